"""
auth — account authentication module.

Provides:
  • ``AuthService`` façade: register, login, token checks, account lookup
  • JWT access tokens (PyJWT, HS256)
  • Password hashing (bcrypt)
  • Register / Login / Verify API routes
  • ``get_current_user`` FastAPI dependency
"""
