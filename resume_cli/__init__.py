"""
resume_cli - command-line client for the resume compilation service

Validates a JSON resume and a job description source, then submits a
compilation job to the service over HTTP.

Architecture:
- Intake Context: Input validation and request assembly
- Submission Context: Wire encoding, HTTP exchange, outcome classification
"""

__version__ = "0.1.0"
