"""Plain-text legal document templates."""
from datetime import date
from typing import Dict, List, Optional

DOCUMENT_TEMPLATES: List[Dict[str, str]] = [
    {"id": "affidavit", "name": "Affidavit", "category": "court"},
    {"id": "rental-agreement", "name": "Rental Agreement", "category": "property"},
    {"id": "will", "name": "Last Will and Testament", "category": "personal"},
    {"id": "nda", "name": "Non-Disclosure Agreement", "category": "business"},
    {"id": "employment", "name": "Employment Contract", "category": "business"},
    {"id": "complaint", "name": "Legal Complaint", "category": "court"},
    {"id": "divorce", "name": "Divorce Petition", "category": "family"},
    {"id": "poa", "name": "Power of Attorney", "category": "personal"},
]

DISCLAIMER = "DISCLAIMER: This document is generated as a template and may need professional legal review before use."


class UnknownTemplateError(KeyError):
    pass


def get_template(template_id: str) -> Optional[Dict[str, str]]:
    for template in DOCUMENT_TEMPLATES:
        if template["id"] == template_id:
            return template
    return None


def _affidavit(fields: Dict[str, str], today: date) -> str:
    return f"""AFFIDAVIT

I, {fields['full_name']}, son/daughter of ______________, aged {fields.get('age', '____')} years, residing at {fields.get('address', '[Address]')}, do hereby solemnly affirm and declare as follows:

1. That I am the deponent in this case and am fully conversant with the facts of this case.
2. {fields.get('affidavit_content') or 'That the contents of this affidavit are true to the best of my knowledge.'}
3. That I have not concealed or misrepresented any material facts in this affidavit.

I solemnly affirm that the contents of this affidavit are true to the best of my knowledge, no part of it is false, and nothing material has been concealed therein.

Verified at {fields.get('city') or '[City]'} on this {today.day} day of {today.strftime('%B')}, {today.year}.

Deponent
{fields['full_name']}
"""


def _rental_agreement(fields: Dict[str, str], today: date) -> str:
    owner = fields.get("owner_name")
    return f"""RENTAL AGREEMENT

This Rental Agreement is made on {today.strftime('%d/%m/%Y')} between {owner or '[Owner Name]'} (hereinafter referred to as the "LANDLORD") and {fields['full_name']} (hereinafter referred to as the "TENANT").

PROPERTY ADDRESS: {fields.get('address', '[Address]')}

TERMS AND CONDITIONS:
1. The landlord agrees to rent the premises to the tenant for a period of {fields.get('rental_period') or '11 months'} commencing from {fields.get('start_date') or '[Start Date]'}.
2. The monthly rent shall be Rs. {fields.get('rent_amount') or '[Amount]'} payable in advance on or before the 5th day of each calendar month.
3. The tenant has paid a refundable security deposit of Rs. {fields.get('deposit_amount') or '[Amount]'}.

IN WITNESS WHEREOF, the parties hereto have set their hands on the day and year first written above.

LANDLORD                          TENANT
{owner or '___________'}                 {fields['full_name']}
"""


def _generic(template: Dict[str, str], fields: Dict[str, str], today: date) -> str:
    details = "\n".join(
        f"- {key}: {value}" for key, value in fields.items() if key != "full_name"
    )
    return f"""LEGAL DOCUMENT: {template['name'].upper()}

This document is generated for {fields['full_name']} on {today.strftime('%d/%m/%Y')}.

Additional information provided:
{details or '- none'}

{DISCLAIMER}
"""


def generate_document(template_id: str, fields: Dict[str, str], today: Optional[date] = None) -> str:
    """Render ``template_id`` with the caller's ``fields``; ``full_name`` is required."""
    template = get_template(template_id)
    if template is None:
        raise UnknownTemplateError(template_id)

    today = today or date.today()
    if template_id == "affidavit":
        return _affidavit(fields, today)
    if template_id == "rental-agreement":
        return _rental_agreement(fields, today)
    return _generic(template, fields, today)
