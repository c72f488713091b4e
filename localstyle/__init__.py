"""LocalStyle brand admin: staff directory, category tree and catalog API."""
