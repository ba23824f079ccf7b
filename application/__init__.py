"""
Application Layer for the WebFitness API.

This package contains:
- ports/: Abstract repository interfaces (what the use cases need)
- use_cases/: Orchestration of the store behind the HTTP façade
"""
