"""
Interfaces layer package.

Contains FastAPI routers and Pydantic request/response schemas.
No business logic belongs here. Routes call services and return responses.
"""
