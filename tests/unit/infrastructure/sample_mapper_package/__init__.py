"""Package of event mappers, scanned together with its submodules."""
