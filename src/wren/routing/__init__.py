"""Routing — reversible URL patterns, an ordered route table, and the router.

Routes are registered while the router is constructed; the table is
read-only once dispatch begins.
"""
