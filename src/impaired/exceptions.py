"""Exceptions for use in Impaired"""

# Impaired
# Copyright (C) 2025  Impaired developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.


# ========== Base Application Exception ==========


class ImpairedException(Exception):
    """Base exception for all Impaired errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Comparison Exceptions ==========


class ComparisonException(ImpairedException):
    """Base exception for comparison-related errors."""

    pass


class InvalidComparisonException(ComparisonException, ValueError):
    """Raised when a comparison would pit an item against itself."""

    pass


class InvalidWinnerException(ComparisonException, ValueError):
    """Raised when a winner is not one of the two items of a comparison."""

    pass


# ========== Sequencer Exceptions ==========


class SequencerException(ImpairedException):
    """Base exception for sequencer-related errors."""

    pass


class SequencerStateException(SequencerException, RuntimeError):
    """Raised when the sequencer is in an invalid state for the requested operation."""

    pass


# ========== Result Exceptions ==========


class ResultException(ImpairedException):
    """Base exception for result recording errors."""

    pass


class InvalidResultException(ResultException, ValueError):
    """Raised when a result is invalid (e.g., an item beating itself)."""

    pass


# ========== Session Exceptions ==========


class SessionException(ImpairedException):
    """Base exception for comparison session errors."""

    pass


class SessionStateException(SessionException, RuntimeError):
    """Raised when the session is in an invalid state for the requested operation."""

    pass


class ItemNotFoundException(SessionException, LookupError):
    """Raised when a requested item handle cannot be found."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(ImpairedException):
    """Base exception for resource-related errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a file cannot be loaded."""

    pass


class FileSaveException(ResourceException):
    """Raised when a file cannot be saved."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(ImpairedException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass


class MissingConfigurationException(ConfigurationException):
    """Raised when required configuration is missing."""

    pass
