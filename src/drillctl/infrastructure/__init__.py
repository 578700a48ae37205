"""Infrastructure layer — edge files and the NetworkX graph engine.

This layer depends on stdlib and third-party libs (NetworkX).
It must never import from domain, services, commands, or output.
The service layer bridges between domain functions and infrastructure.
"""
