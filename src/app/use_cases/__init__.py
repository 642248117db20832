"""
Use Cases

Organized into domain folders:
- shares/: Vehicle share links (owner management and public resolution)
- notifications/: Per-user notification feed

Import from subdirectories.
"""
