"""
Infrastructure Layer - adapters for the domain ports.

- persistence/ → Prisma (PostgreSQL) conversation store
- llm/         → model providers (OpenAI SDK, plain HTTP)
- auth/        → JWT credential verification
"""
