"""Club back-office service."""
