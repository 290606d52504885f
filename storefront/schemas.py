from pydantic import BaseModel, ConfigDict, Field, field_validator

USERNAME_PATTERN = r"^[a-z0-9._-]{3,50}$"
# largest value a Numeric(12, 2) column holds
MAX_PRICE = 9999999999.99


class _ApiModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


# ---------- auth ----------


class RegisterIn(_ApiModel):
    # no isAdmin field: registration never grants admin
    username: str = Field(pattern=USERNAME_PATTERN)
    password: str = Field(min_length=6, max_length=128)

    @field_validator("username", mode="before")
    @classmethod
    def normalize_username(cls, value):
        return value.strip().lower() if isinstance(value, str) else value


class LoginIn(_ApiModel):
    username: str = Field(min_length=1, max_length=50)
    password: str = Field(min_length=1, max_length=128)

    @field_validator("username", mode="before")
    @classmethod
    def normalize_username(cls, value):
        return value.strip().lower() if isinstance(value, str) else value


class SessionUser(_ApiModel):
    username: str
    is_admin: bool = Field(alias="isAdmin")


class LoginOut(_ApiModel):
    token: str
    user: SessionUser


class MessageOut(_ApiModel):
    message: str


# ---------- users ----------


class UserOut(_ApiModel):
    id: int
    username: str
    is_admin: bool = Field(alias="isAdmin")


class UserCreateIn(_ApiModel):
    username: str = Field(pattern=USERNAME_PATTERN)
    password: str = Field(min_length=6, max_length=128)
    is_admin: bool = Field(False, alias="isAdmin")

    @field_validator("username", mode="before")
    @classmethod
    def normalize_username(cls, value):
        return value.strip().lower() if isinstance(value, str) else value


class UserUpdateIn(_ApiModel):
    username: str | None = Field(None, pattern=USERNAME_PATTERN)
    password: str | None = Field(None, min_length=6, max_length=128)

    @field_validator("username", mode="before")
    @classmethod
    def normalize_username(cls, value):
        return value.strip().lower() if isinstance(value, str) else value


class AdminFlagIn(_ApiModel):
    is_admin: bool = Field(alias="isAdmin")


# ---------- products ----------


class ProductIn(_ApiModel):
    name: str = Field(min_length=1, max_length=150)
    description: str = Field("", max_length=5000)
    price: float = Field(ge=0, le=MAX_PRICE, allow_inf_nan=False)
    image_url: str | None = Field(None, alias="imageUrl", max_length=255)


class ProductUpdateIn(_ApiModel):
    name: str | None = Field(None, min_length=1, max_length=150)
    description: str | None = Field(None, max_length=5000)
    price: float | None = Field(None, ge=0, le=MAX_PRICE, allow_inf_nan=False)
    image_url: str | None = Field(None, alias="imageUrl", max_length=255)


class ProductOut(_ApiModel):
    id: int
    name: str
    description: str
    price: float
    image_url: str | None = Field(None, alias="imageUrl")

    @field_validator("price", mode="before")
    @classmethod
    def price_as_float(cls, value):
        return float(value) if value is not None else value


class ProductCreatedOut(_ApiModel):
    message: str
    product: ProductOut


# ---------- upload / contact ----------


class UploadOut(_ApiModel):
    message: str
    filename: str
    url: str


class ContactIn(_ApiModel):
    name: str = Field(min_length=1, max_length=120)
    email: str = Field(min_length=3, max_length=320)
    message: str = Field(min_length=1, max_length=5000)
