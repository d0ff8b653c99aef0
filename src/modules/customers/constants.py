"""Field limits shared by the model, the DTOs and the serializers."""

NAME_MAX_LENGTH = 50
EMAIL_MAX_LENGTH = 254
