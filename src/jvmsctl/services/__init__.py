"""Operations behind the CLI commands and the shim."""
