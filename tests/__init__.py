"""Test-suite for the art gallery service."""
