class StatusHandler:
    """
    Subscription callback for J5Status messages.

    Every message is logged once as it arrives. Nothing is filtered and no
    state is kept between messages.
    """
    def __init__(self, logger):
        self.logger = logger

    def __call__(self, msg):
        self.logger.info(format_status(msg))


def format_status(msg):
    return (
        f'RCV Status: EXT_CONTROL: {int(msg.external_control)} '
        f'FAULT: {int(msg.fault)} '
        f'CONTACTORS: {int(msg.contactors)} '
        f'VOLTAGE: {msg.voltage:.1f}'
    )
