from .base import NEW_GUESS_EVENT, Notifier
from .notifier import KafkaNotifier
