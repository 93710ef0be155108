"""Host adapters for the editor shell."""
