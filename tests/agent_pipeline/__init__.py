"""
Agent Pipeline Tests Package.

Tests for the core.agent_pipeline module including:
- Condition formula parsing, editing, validation and evaluation
- Module registry and built-in module definitions
- Dynamic output, router and trigger resolution
- Pipeline model, validation and execution boundary
"""
