"""Hostel leave approval package.

Students submit leave requests, parents and administrators decide on them
independently. Organised by feature modules (identity, leaves, cache) with a
thin Flask controller layer on the server side and a client-side registry
that keeps a local cache in step with the remote store.
"""
