from subscriptions.helper import SavedPaymentOptions, SubscriptionHelper

__all__ = ["SavedPaymentOptions", "SubscriptionHelper"]
