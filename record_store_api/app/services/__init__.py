"""
Service layer.

``RecordStore`` owns the records and enforces their invariants.  API
handlers only translate between HTTP and the store's operations.
"""
