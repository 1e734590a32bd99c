"""Components layer - domain logic modules.

This layer contains the modules that do the actual work:
- Layer contribution and cache avoidance
- Layer record persistence
- Buildpack descriptor loading
- Status output

Components are leaf modules that:
- Do NOT import services or interfaces
- ARE imported and used BY services and interfaces
"""
