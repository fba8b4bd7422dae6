# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Mirathi - Kenyan succession-law compliance engine.

Evaluates family aggregates (members, marriages, polygamous houses) against
the Law of Succession Act and produces a scored compliance report.
"""

__version__ = "1.0.0"
