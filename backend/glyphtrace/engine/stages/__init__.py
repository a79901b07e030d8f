"""Conversion stages. Each module registers one stage via ``@stage``."""
