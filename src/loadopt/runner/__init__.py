"""Job runner, synthetic datasets and the command-line entry point."""
