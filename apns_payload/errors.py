class PayloadError(Exception):
    pass


class PayloadTooLargeError(PayloadError):
    def __init__(self, length, limit):
        super().__init__()
        self.length = length
        self.limit = limit

    def __repr__(self):
        return "PayloadTooLargeError(length={}, limit={})".format(
            self.length, self.limit)

    def __str__(self):
        return "payload is {} bytes, limit is {}".format(
            self.length, self.limit)
