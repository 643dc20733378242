"""Notes API — request/response schemas."""
