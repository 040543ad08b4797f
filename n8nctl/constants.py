"""
n8nctl Constants

Centralized constants for the default deployment layout and magic values.
Every path here is relative to the deployment directory and can be
overridden through n8nctl.yml.
"""

# Deployment directory resolution
ENV_DIR_VARIABLE = "N8NCTL_DIR"
CONFIG_OVERRIDE_FILE = "n8nctl.yml"

# Orchestration engine
DOCKER_BINARY = "docker"
DEFAULT_COMPOSE_FILE = "docker-compose.yml"

# Configuration files
DEFAULT_ENV_FILE = ".env"
DEFAULT_ENV_TEMPLATE = ".env.example"

# TLS material consumed by the reverse proxy
DEFAULT_CERT_DIR = "files"
REQUIRED_CERTIFICATES = ("cert.pem", "key.pem", "mbma-chain.pem")

# Services
DEFAULT_APP_SERVICE = "n8n"
DEFAULT_APP_DATA_PATH = "/home/node/.n8n"
DEFAULT_WORKER_SERVICE = "n8n-worker"
DEFAULT_DB_SERVICE = "postgres"
DEFAULT_DB_USER = "n8n"
DEFAULT_DB_NAME = "n8n"
DEFAULT_APP_URL = "https://localhost:5678"

# Backups
DEFAULT_BACKUP_DIR = "backups"
BACKUP_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"
POSTGRES_BACKUP_PREFIX = "postgres_backup_"
POSTGRES_BACKUP_EXTENSION = ".sql"
N8N_DATA_BACKUP_PREFIX = "n8n_data_backup_"
N8N_DATA_BACKUP_EXTENSION = ".tar.gz"

# Logs
DEFAULT_LOG_TAIL = 100

# Health probes: (service name, url, verify TLS)
# n8n serves a self-signed certificate on 5678, so verification is off there.
DEFAULT_HEALTH_TARGETS = (
    ("n8n", "https://localhost:5678/healthz", False),
    ("Nginx", "http://localhost/health", True),
)
HEALTH_PROBE_TIMEOUT = 5

# Scaling
REPLICA_COUNT_PATTERN = r"[0-9]+"

# Credential slots: (env key, bytes of randomness before base64 encoding)
SECRET_SLOTS = (
    ("N8N_ENCRYPTION_KEY", 32),
    ("N8N_JWT_SECRET", 32),
    ("POSTGRES_PASSWORD", 16),
    ("REDIS_PASSWORD", 16),
    ("N8N_BASIC_AUTH_PASSWORD", 16),
)

# Log Configuration
LOG_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"

# Messages
ERROR_ENV_NOT_CONFIGURED = "Please configure .env file before starting services"
SUCCESS_SERVICES_STARTED = "Services started successfully"
SUCCESS_ALL_CHECKS = "All checks passed"
