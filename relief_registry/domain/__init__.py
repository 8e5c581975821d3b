# SPDX-License-Identifier: Apache-2.0

"""
Domain logic package for the relief registries.

This package contains pure validation functions and the error taxonomy.
Nothing here holds state; registries in ``services`` own the records.
"""
