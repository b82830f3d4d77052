"""Checkout flow: the create-order backend and the button callbacks."""
