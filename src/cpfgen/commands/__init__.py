"""Click commands attached to the root ``cpfgen`` group in :mod:`cpfgen.cli`."""
