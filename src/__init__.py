"""
Source Code Root Module

This module serves as the root for the source code of the rainwater
savings service.

Layer Structure:
- Domain: Entities, the water collection calculator and ports
- Application: Use cases and DTOs
- Infrastructure: Open-Meteo gateway and the in-memory cache
- Presentation: FastAPI controllers
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, application entry point and configuration
"""
