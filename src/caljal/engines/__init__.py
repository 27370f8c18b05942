"""Conversion core, calendar math and the validating adapter."""
