"""Interfaces (application boundary) for PRONOS.

Defines framework-free application contracts: the ports through which the
service layer reaches a user directory, an ambient authentication source and
an ID generator. Business rules stay out of this package.

Dependency rule: this package may import `pronos.domain` value objects only. It
may be imported by `pronos.service_layer`, `pronos.adapters`, and
`pronos.bootstrap`.
"""
