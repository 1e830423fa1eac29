"""Worked examples of transforming data with comprehensions, generators and iterator chains."""

__version__ = "0.1.0"