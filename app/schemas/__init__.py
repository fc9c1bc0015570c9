"""
Pydantic request/response schemas.

Schemas are separate from the ORM models: they define the camelCase JSON
contract, while the models keep snake_case attribute names.
"""
