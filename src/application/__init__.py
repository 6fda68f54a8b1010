"""
Application Layer Package

Use cases that turn validated water savings and health queries into
domain calls, plus the DTOs returned to the presentation layer.
"""

from src.application import dtos, use_cases

__all__ = ["dtos", "use_cases"]
