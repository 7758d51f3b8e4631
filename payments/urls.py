"""
URL configuration for the payments app.

Include under ``api/`` at the project root.
"""
from django.urls import path
from .views import ConfirmPaymentView, CreatePaymentIntentView

urlpatterns = [
    path("create-payment-intent/", CreatePaymentIntentView.as_view(), name="create_payment_intent"),
    path("confirm-payment/", ConfirmPaymentView.as_view(), name="confirm_payment"),
]
