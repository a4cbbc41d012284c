"""Encoding of FIX messages as JSON."""