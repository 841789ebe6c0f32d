"""Concrete implementations of `core.interfaces.data_source.DataSource`."""
