"""n8nctl CLI commands"""
