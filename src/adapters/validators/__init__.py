"""Validator adapters - Email validation implementations."""

from .validator import EmailValidatorAdapter

__all__ = ["EmailValidatorAdapter"]
