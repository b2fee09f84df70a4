"""Domain layer: configuration model, identification and redaction."""
