"""Command line interface for running bot commands locally."""
