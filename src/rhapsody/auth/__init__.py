# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Admin authentication.

This package provides:
- Session token wire format (base64url payload + hex HMAC-SHA256)
- Admin password check (plain, or argon2 hash)
- Session issuing and authoritative verification
- Signature-blind edge check for /admin navigations
"""
