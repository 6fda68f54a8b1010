"""
Presentation Layer Package

FastAPI routers exposing the water savings calculation and the
health endpoint.
"""

from src.presentation import controllers

__all__ = ["controllers"]
