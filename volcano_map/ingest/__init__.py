"""Tabular dataset ingestion."""
