"""Routing — route store, pattern compiler, chunked matcher and reverse router.

Routes are registered during setup. Dynamic routes are merged into a
small number of combined regexes the first time a request misses every
static route, and again whenever new dynamic routes were added since.
"""
