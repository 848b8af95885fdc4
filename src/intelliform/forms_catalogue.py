"""Catalogue of verified government forms."""

from intelliform.domain.forms import FieldDefinition, FieldType, FormSchema

_GENDERS = ("Male", "Female", "Other")


def _full_name(prompt: str = "What is your full name?") -> FieldDefinition:
    return FieldDefinition(name="full_name", prompt=prompt)


def _date_of_birth() -> FieldDefinition:
    return FieldDefinition(
        name="date_of_birth",
        prompt="What is your date of birth? (DD/MM/YYYY format)",
        type=FieldType.DATE,
    )


def _mobile_number(
    prompt: str = "What is your mobile number?",
) -> FieldDefinition:
    return FieldDefinition(name="mobile_number", prompt=prompt, type=FieldType.PHONE)


def _email_address(
    prompt: str = "What is your email address?", *, required: bool = True
) -> FieldDefinition:
    return FieldDefinition(
        name="email_address",
        prompt=prompt,
        type=FieldType.EMAIL,
        required=required,
    )


PAN_CARD_APPLICATION = FormSchema(
    id="pan_card_application",
    name="PAN Card Application",
    authority="Income Tax Department, Government of India",
    form_number="Form 49A (Individuals) / Form 49AA (Foreign Citizens)",
    official_website="https://www.incometax.gov.in/",
    fields=(
        FieldDefinition(
            name="applicant_category",
            prompt="What category of applicant are you?",
            type=FieldType.CHOICE,
            options=(
                "Individual",
                "HUF",
                "Company",
                "Firm",
                "Trust",
                "Association of Persons",
            ),
        ),
        _full_name("What is your full name? (As per Aadhaar/ID proof)"),
        FieldDefinition(
            name="father_name", prompt="What is your father's full name?"
        ),
        _date_of_birth(),
        _mobile_number(),
        _email_address(),
        FieldDefinition(
            name="address",
            prompt="What is your complete residential address?",
            type=FieldType.LONG_TEXT,
        ),
        FieldDefinition(
            name="id_proof",
            prompt="Which ID proof are you submitting?",
            type=FieldType.CHOICE,
            options=("Aadhaar Card", "Voter ID", "Passport", "Driving License"),
        ),
        FieldDefinition(
            name="address_proof",
            prompt="Which address proof are you submitting?",
            type=FieldType.CHOICE,
            options=(
                "Aadhaar Card",
                "Electricity Bill",
                "Water Bill",
                "Passport",
                "Rental Agreement",
            ),
        ),
    ),
    documents=(
        "Identity Proof (Aadhaar/Voter ID/Passport/Driving License)",
        "Address Proof (Utility Bill/Bank Statement/Rental Agreement)",
        "Recent Passport Size Photograph",
        "Date of Birth Proof (Birth Certificate/School Certificate)",
        "Digital Signature (if applying online)",
    ),
    fees="₹110 for Indian Citizens (Physical), ₹50 (e-filing), "
    "₹1020 for Foreign Citizens",
    processing_time="15-30 days",
    last_verified="2024-08-01",
    keywords=("pan", "pan card", "form 49a", "permanent account number"),
)

PASSPORT_APPLICATION = FormSchema(
    id="passport_application",
    name="Passport Application",
    authority="Passport Seva Kendra, Ministry of External Affairs",
    form_number="Online Application Form",
    official_website="https://www.passportindia.gov.in/",
    fields=(
        FieldDefinition(
            name="application_type",
            prompt="What type of passport application are you submitting?",
            type=FieldType.CHOICE,
            options=("Fresh Passport", "Reissue of Passport", "Tatkal Passport"),
        ),
        _full_name("What is your full name? (As per documents)"),
        _date_of_birth(),
        FieldDefinition(
            name="place_of_birth",
            prompt="What is your place of birth? (City and State/Country)",
        ),
        FieldDefinition(
            name="gender",
            prompt="What is your gender?",
            type=FieldType.CHOICE,
            options=_GENDERS,
        ),
        FieldDefinition(
            name="marital_status",
            prompt="What is your marital status?",
            type=FieldType.CHOICE,
            options=("Single", "Married", "Divorced", "Widowed"),
        ),
        FieldDefinition(
            name="address",
            prompt="What is your present residential address?",
            type=FieldType.LONG_TEXT,
        ),
        _mobile_number(),
        _email_address(),
        FieldDefinition(
            name="emergency_contact",
            prompt="What is your emergency contact name and number?",
        ),
    ),
    documents=(
        "Aadhaar Card",
        "Birth Certificate/10th Certificate (for DOB proof)",
        "Address Proof (Utility Bill/Bank Statement)",
        "Recent Passport Size Photographs (4-6)",
        "Previous Passport (if reissue)",
    ),
    fees="₹1500 (Normal), ₹3500 (Tatkal), ₹2000 (36-page booklet)",
    processing_time="7-30 days (Normal), 1-3 days (Tatkal)",
    last_verified="2024-08-01",
    keywords=("passport", "tatkal"),
)

DRIVING_LICENSE = FormSchema(
    id="driving_license",
    name="Driving License Application",
    authority="Regional Transport Office (RTO)",
    form_number="Form 4 (Learner's License), Form 7 (Permanent License)",
    official_website="https://parivahan.gov.in/",
    fields=(
        FieldDefinition(
            name="license_type",
            prompt="What type of driving license are you applying for?",
            type=FieldType.CHOICE,
            options=(
                "Learner's License",
                "Permanent Driving License",
                "International Driving Permit",
            ),
        ),
        FieldDefinition(
            name="vehicle_category",
            prompt="For which vehicle category?",
            type=FieldType.CHOICE,
            options=(
                "Two Wheeler",
                "Light Motor Vehicle (Car)",
                "Commercial Vehicle",
                "Heavy Vehicle",
            ),
        ),
        _full_name(),
        FieldDefinition(
            name="father_name", prompt="What is your father's/husband's name?"
        ),
        _date_of_birth(),
        FieldDefinition(
            name="blood_group",
            prompt="What is your blood group?",
            type=FieldType.CHOICE,
            options=("A+", "A-", "B+", "B-", "AB+", "AB-", "O+", "O-"),
        ),
        FieldDefinition(
            name="address",
            prompt="What is your permanent address?",
            type=FieldType.LONG_TEXT,
        ),
        _mobile_number(),
        _email_address(),
    ),
    documents=(
        "Age Proof (10th Certificate/Birth Certificate/Aadhaar)",
        "Address Proof (Aadhaar/Utility Bill/Rental Agreement)",
        "Identity Proof (Aadhaar/PAN/Voter ID)",
        "Recent Passport Size Photographs",
        "Medical Certificate (Form 1A)",
    ),
    fees="₹200 (Learner's License), ₹300-500 (Permanent License)",
    processing_time="7-30 days",
    last_verified="2024-08-01",
    keywords=("driving", "driver", "learner", "rto", "dl"),
)

VOTER_ID = FormSchema(
    id="voter_id",
    name="Voter ID Registration",
    authority="Election Commission of India",
    form_number="Form 6",
    official_website="https://www.nvsp.in/",
    fields=(
        _full_name(),
        FieldDefinition(
            name="relative_name",
            prompt="What is your father's/mother's/husband's name?",
        ),
        _date_of_birth(),
        FieldDefinition(
            name="gender",
            prompt="What is your gender?",
            type=FieldType.CHOICE,
            options=_GENDERS,
        ),
        FieldDefinition(
            name="current_address",
            prompt="What is your current residential address?",
            type=FieldType.LONG_TEXT,
        ),
        FieldDefinition(
            name="permanent_address",
            prompt="What is your permanent address? (If different from current)",
            type=FieldType.LONG_TEXT,
            required=False,
        ),
        _mobile_number(),
        _email_address(required=False),
        FieldDefinition(
            name="previous_voter_id",
            prompt="Do you have a previous Voter ID? If yes, provide the number",
            required=False,
        ),
    ),
    documents=(
        "Age Proof (Birth Certificate/10th Certificate/Aadhaar)",
        "Address Proof (Utility Bill/Bank Statement/Rental Agreement)",
        "Recent Passport Size Photographs",
        "Previous Voter ID (if applicable for change/correction)",
    ),
    fees="Free of cost",
    processing_time="30-60 days",
    last_verified="2024-08-01",
    keywords=("voter", "voter id", "election", "epic", "form 6"),
)

FSSAI_FOOD_LICENSE = FormSchema(
    id="fssai_food_license",
    name="FSSAI Food Safety License",
    authority="Food Safety and Standards Authority of India (FSSAI)",
    form_number="Form A/B/C",
    official_website="https://www.fssai.gov.in/",
    fields=(
        FieldDefinition(
            name="license_type",
            prompt="What type of FSSAI license do you need?",
            type=FieldType.CHOICE,
            options=(
                "Basic Registration (<₹12 lakh turnover)",
                "State License (₹12 lakh - ₹20 crore)",
                "Central License (>₹20 crore)",
            ),
        ),
        FieldDefinition(
            name="business_name",
            prompt="What is the exact name of your food business?",
        ),
        FieldDefinition(
            name="owner_name",
            prompt="What is the full name of the business owner/proprietor?",
        ),
        FieldDefinition(
            name="business_address",
            prompt=(
                "What is the complete business address? (Include building "
                "number, street, area, city, state, pincode)"
            ),
            type=FieldType.LONG_TEXT,
        ),
        FieldDefinition(
            name="owner_address",
            prompt="What is the owner's residential address?",
            type=FieldType.LONG_TEXT,
        ),
        _email_address(
            "What is your email address? (Electronic mail like name@example.com)"
        ),
        _mobile_number("What is your mobile number? (10-digit Indian mobile number)"),
        FieldDefinition(
            name="food_category",
            prompt="What type of food business are you operating?",
            type=FieldType.CHOICE,
            options=(
                "Restaurant/Dhaba",
                "Catering Services",
                "Food Manufacturing",
                "Food Trading/Distribution",
                "Online Food Business",
                "Bakery",
                "Sweet Shop",
                "Other",
            ),
        ),
        FieldDefinition(
            name="annual_turnover",
            prompt="What is your expected annual business turnover?",
        ),
    ),
    documents=(
        "Identity Proof of Owner (Aadhaar Card/PAN Card)",
        "Business Address Proof (Rent Agreement/Property Documents)",
        "NOC from Local Authority/Municipal Corporation",
        "Water Test Report (if applicable)",
        "Layout Plan of Business Premises",
    ),
    fees="₹100 (Basic), ₹2000-5000 (State), ₹7500+ (Central)",
    processing_time="7-60 days depending on license type",
    last_verified="2024-01-15",
    keywords=("fssai", "food", "restaurant", "catering", "bakery"),
)

GST_REGISTRATION = FormSchema(
    id="gst_registration",
    name="GST Registration",
    authority="Goods and Services Tax Network (GSTN)",
    form_number="GST REG-01",
    official_website="https://www.gst.gov.in/",
    fields=(
        FieldDefinition(
            name="business_type",
            prompt="What type of business entity are you registering?",
            type=FieldType.CHOICE,
            options=(
                "Proprietorship",
                "Partnership",
                "Private Limited Company",
                "Public Limited Company",
                "LLP",
                "Trust",
                "NGO",
                "Other",
            ),
        ),
        FieldDefinition(
            name="business_name",
            prompt="What is your business name for GST registration?",
        ),
        FieldDefinition(
            name="pan_number",
            prompt="What is your PAN number? (Format: AAAAA9999A)",
        ),
        FieldDefinition(
            name="business_address",
            prompt="What is your principal place of business address?",
            type=FieldType.LONG_TEXT,
        ),
        FieldDefinition(
            name="proprietor_name",
            prompt="What is the full name of the proprietor/authorized person?",
        ),
        _email_address("What is your email address for GST communication?"),
        _mobile_number(),
        FieldDefinition(
            name="bank_account",
            prompt=(
                "What are your business bank account details? "
                "(Bank name and account number)"
            ),
        ),
        FieldDefinition(
            name="business_activity",
            prompt="What is your main business activity?",
        ),
        FieldDefinition(
            name="expected_turnover",
            prompt="What is your expected annual turnover?",
        ),
    ),
    documents=(
        "PAN Card of Business/Proprietor",
        "Business Address Proof",
        "Bank Account Statement/Cancelled Cheque",
        "Identity Proof of Authorized Signatory",
        "Business Registration Certificate (if applicable)",
    ),
    fees="Free for online registration",
    processing_time="3-7 working days",
    last_verified="2024-01-15",
    keywords=("gst", "gstin", "goods and services tax"),
)

COMPANY_REGISTRATION = FormSchema(
    id="company_registration",
    name="Private Limited Company Registration",
    authority="Registrar of Companies (ROC), Ministry of Corporate Affairs",
    form_number="SPICe+ (INC-32)",
    official_website="https://www.mca.gov.in/",
    fields=(
        FieldDefinition(
            name="company_name",
            prompt=(
                "What is your proposed company name? "
                "(Must end with 'Private Limited')"
            ),
        ),
        FieldDefinition(
            name="company_type",
            prompt="What type of company do you want to register?",
            type=FieldType.CHOICE,
            options=(
                "Private Limited Company",
                "One Person Company (OPC)",
                "Public Limited Company",
                "Limited Liability Partnership (LLP)",
            ),
        ),
        FieldDefinition(
            name="registered_office",
            prompt="What is the registered office address?",
            type=FieldType.LONG_TEXT,
        ),
        FieldDefinition(
            name="authorized_capital",
            prompt="What is the authorized capital amount? (Minimum ₹1,00,000)",
        ),
        FieldDefinition(
            name="director1_name", prompt="What is the full name of Director 1?"
        ),
        FieldDefinition(
            name="director1_pan", prompt="What is the PAN number of Director 1?"
        ),
        FieldDefinition(
            name="director2_name",
            prompt="What is the full name of Director 2? (Required for Pvt Ltd)",
            required=False,
        ),
        FieldDefinition(
            name="director2_pan",
            prompt="What is the PAN number of Director 2?",
            required=False,
        ),
        FieldDefinition(
            name="business_activity",
            prompt="What will be the main business activity of the company?",
        ),
        _email_address("What is the company's email address?"),
    ),
    documents=(
        "PAN Card of all Directors",
        "Aadhaar Card of all Directors",
        "Registered Office Address Proof",
        "NOC from Property Owner",
        "Digital Signature Certificate (DSC) of Directors",
    ),
    fees="₹4,000 - ₹10,000 depending on authorized capital",
    processing_time="10-15 working days",
    last_verified="2024-01-15",
    keywords=(
        "company",
        "private limited",
        "pvt ltd",
        "incorporation",
        "incorporate",
        "spice",
        "opc",
    ),
)


def verified_forms() -> tuple[FormSchema, ...]:
    """Return the built-in forms in registration order."""
    return (
        PAN_CARD_APPLICATION,
        PASSPORT_APPLICATION,
        DRIVING_LICENSE,
        VOTER_ID,
        FSSAI_FOOD_LICENSE,
        GST_REGISTRATION,
        COMPANY_REGISTRATION,
    )
