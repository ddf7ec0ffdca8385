"""Errors raised by the service layer."""


class CustomerNotFoundError(LookupError):
    def __init__(self, customer_id: int):
        super().__init__(f"Customer {customer_id} not found")
        self.customer_id = customer_id
