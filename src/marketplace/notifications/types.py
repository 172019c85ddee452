from enum import Enum


class NotificationType(Enum):
    EMAIL_VERIFICATION = "Email_Verification"
    REGISTRATION = "Registration"
    EMAIL_VERIFIED = "Email_Verified"
    PROFILE_UPDATED = "Profile_Updated"
    ACCOUNT_DELETED = "Account_Deleted"
    PRODUCT_ADDED = "Product_Added"
    PRODUCT_UPDATED = "Product_Updated"
    PRODUCT_DELETED = "Product_Deleted"
