"""
Application Layer

Prompt builders, structured-output schemas and use cases.
"""
