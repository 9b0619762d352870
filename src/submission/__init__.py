"""
Review submission.

Input validation, current user identity and the submission controller.
"""
