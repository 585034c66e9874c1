"""
Contracts (data models).

This folder defines the request/response shapes for cheque collection and
loan data, e.g.:
- Cheque collection requests, items, image references and pickup details
- The payload forwarded to the bank and the bank's reply
- Loan schedules and loan timelines

Why this exists:
- Mock and real clients return the same shapes
- Routes and providers rely on stable models, not on ad-hoc dicts

Wire format is camelCase JSON; Python attributes are snake_case.
"""
