"""Services: locale registry, shared cache and request locale."""
