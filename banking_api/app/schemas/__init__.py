"""
Pydantic models for the stored entities and the response envelope.

The models are both the store's records and the source of the JSON
sent to clients (camelCase keys via ``to_public``).
"""
