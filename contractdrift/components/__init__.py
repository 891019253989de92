"""Components layer - domain building blocks.

Components are leaf modules that:
- Do NOT import services, workflows, or interfaces
- ARE imported and used BY workflows and services
- May import from: helpers, other components

Architecture:
- helpers/ = stdlib-only utilities (pure, stateless)
- components/ = domain logic building blocks (this layer)
- workflows/ = orchestration of components
- services/ = configuration, long-lived caller state
- interfaces/ = HTTP/CLI presentation
"""
