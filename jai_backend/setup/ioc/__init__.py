"""
IoC - Dishka providers and container factory.

container.py is not imported here: it pulls in the generated Prisma client.
"""

from jai_backend.setup.ioc.application import ApplicationProvider

__all__ = ["ApplicationProvider"]
