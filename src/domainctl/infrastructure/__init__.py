"""Infrastructure layer — catalog source, clipboard, and feedback adapters."""
