"""Shared Kernel module.

Value objects and probes that more than one bounded context agrees to
depend on. Currently this is the resolved tenant context, which route
handlers outside the tenancy context read.
"""
