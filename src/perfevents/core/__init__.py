"""Core domain: models, encoders, ports and the dispatcher."""
