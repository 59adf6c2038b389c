"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from finwell_gateway.infrastructure.clients.generator import ProfileGeneratorClient


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_generator_client() -> ProfileGeneratorClient:
    """Provide profile generator client instance"""
    return ProfileGeneratorClient()
