"""Pure domain logic: paths, configuration model, shim catalog, errors."""
