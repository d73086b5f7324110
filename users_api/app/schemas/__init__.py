"""
Pydantic schema definitions for API payloads.

Schemas describe the shape of user records on the wire and the rules
applied to incoming create/update payloads.
"""
