"""
Domain Layer Package

This package contains the core business rules of the rainwater savings
service: entities, the water collection calculator, and the contracts
(gateways and ports) implemented by the infrastructure layer.
"""

# Re-export submodules
from src.domain import entities, gateways, ports, services

__all__ = ["entities", "gateways", "ports", "services"]
