"""Marketplace feature modules: benefits, wallets, ownership, purchases.

Submodules are imported explicitly by their users; the SQL repositories
depend on their domain models, so nothing is pulled in eagerly here.
"""
