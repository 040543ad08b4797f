"""n8nctl - lifecycle manager for a Docker Compose based n8n stack"""

__version__ = "1.0.0"
