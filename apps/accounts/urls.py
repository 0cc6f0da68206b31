"""
Accounts URL configuration.

All endpoints are mounted under /api/auth/ by the root URL config.
"""

from django.urls import path

from .views import (
    AccountProfileView,
    ForgotPasswordView,
    LoginView,
    MeView,
    RegisterView,
    ResetPasswordView,
)

urlpatterns = [
    # Authentication
    path("register", RegisterView.as_view(), name="auth-register"),
    path("login", LoginView.as_view(), name="auth-login"),
    path("me", MeView.as_view(), name="auth-me"),

    # Account self-service
    path("profile/<uuid:pk>", AccountProfileView.as_view(), name="auth-profile"),

    # Password management
    path("forgot-password", ForgotPasswordView.as_view(), name="auth-forgot-password"),
    path("reset-password/<str:token>", ResetPasswordView.as_view(), name="auth-reset-password"),
]
