# Schemas package init
"""
TaskHub Backend: Pydantic Request/Response Schemas

Schemas are separate from the SQLAlchemy models: they fix the JSON contract
(camelCase names, `_id`, envelopes) and decide which stored fields are
exposed (the password hash only on login).
"""
