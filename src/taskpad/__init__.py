"""
taskpad: a local-first terminal task manager.

Subpackages:
- core: time helpers, ports (Protocols) and AppState
- tasks: Task model, TaskList store and file persistence
- cli: command registry, prompts, rendering and the entrypoint
- connectors: interactive console loop
"""

__version__ = "0.1.0"
