"""Contract Monthly Claim System package.

Organised by feature modules (claims, users, documents, reporting) with a
thin Flask controller layer over service/repository layers.
"""
