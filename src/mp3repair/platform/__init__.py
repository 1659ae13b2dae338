"""Platform adapters: logging, console output and filesystem access."""
