"""
Services Layer

Business logic that routes call into:
- Accept plain inputs (ids, field values)
- Return domain outputs (User models, None, booleans)
- Do NOT depend on HTTP request/response objects
"""
