"""
Application layer for the program tracker.

This package contains:
- ports/: Repository interfaces (what the services need)
- exceptions: Error taxonomy shared by services, repositories and the API
"""
