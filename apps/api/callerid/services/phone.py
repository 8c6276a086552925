def normalize_lookup_phone(phone_number: str) -> str:
    """Turn a leading space back into ``+`` for phone lookups.

    Some clients send international numbers without URL-encoding the ``+``, so it
    arrives as a space. Only the phone search and spam status lookups apply this.
    """
    # TODO: drop once the mobile client URL-encodes phoneNumber query values.
    if phone_number and phone_number.startswith(" "):
        return "+" + phone_number[1:]
    return phone_number
