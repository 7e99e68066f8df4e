"""Components layer - domain logic modules.

This layer contains the pure building blocks of the content system:
- Normalization of loosely-structured form input into section values
- Verbatim JSON parsing for raw section and document replacement
- Section merging and document summaries

Components are leaf modules that:
- Do NOT import services, workflows, or interfaces
- ARE imported and used BY workflows and services
- May import from: helpers, persistence, other components

Architecture:
- helpers/ = stdlib-only utilities (pure, stateless)
- persistence/ = atomic JSON files and write queues
- components/ = domain logic building blocks (this layer)
- workflows/ = orchestration of components + persistence
- services/ = DI, wiring, long-lived resources
- interfaces/ = CLI presentation
"""
