"""
Application layer - Use cases and business logic orchestration.

This layer contains:
- Application services (orchestrate domain + persistence)
- Transfer objects (DTOs) and record <-> DTO mapping

No direct dependencies on frameworks (FastAPI, etc.)
"""
