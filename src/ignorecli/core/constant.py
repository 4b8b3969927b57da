"""Constants for ignorecli."""

BASE_URL = "https://raw.githubusercontent.com/github/gitignore/main"

OUTPUT_FILENAMES = {
    "git": ".gitignore",
    "docker": ".dockerignore",
}

REDIRECT_STATUSES = (301, 302)

DEFAULT_TIMEOUT = 30
DEFAULT_MAX_REDIRECTS = 5
DEFAULT_CHUNK_SIZE = 8192

USER_AGENT = "ignorecli/0.1.0"
