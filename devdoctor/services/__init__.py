# SPDX-License-Identifier: MIT
"""Services behind the devdoctor CLI.

- checkers: individual checkups (Visual Studio)
- doctor: runs checkups for the current platform and collects diagnoses
"""
