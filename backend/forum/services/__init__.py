"""Services - imperative shell: store queries around pure core validation.

Invariants:
    - Every public service operation runs inside translate_unhandled
    - Services never build HTTP responses (routes do)
"""
