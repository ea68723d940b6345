from __future__ import annotations

from app.schemas.cv import CVData


def render_cv_text(cv: CVData) -> str:
    """Flatten a structured CV into the plain text the ATS checker scores."""
    contact = cv.contact_info
    lines = [
        "CONTACT INFORMATION",
        contact.full_name,
        contact.email,
        contact.phone,
        contact.address,
    ]
    if contact.linkedin:
        lines.append(contact.linkedin)
    if contact.website:
        lines.append(contact.website)

    text = "\n".join(lines) + "\n"
    text += f"\nSUMMARY\n{cv.summary}\n"

    if cv.work_experience:
        text += "\nWORK EXPERIENCE\n"
        for exp in cv.work_experience:
            end = "Present" if exp.current else (exp.end_date or "")
            text += f"{exp.position} at {exp.company}\n"
            text += f"{exp.start_date} - {end}\n"
            text += f"{exp.description}\n\n"

    if cv.education:
        text += "\nEDUCATION\n"
        for edu in cv.education:
            text += f"{edu.degree} in {edu.field}\n"
            text += f"{edu.institution}\n"
            text += f"{edu.start_date} - {edu.end_date}\n"
            if edu.description:
                text += f"{edu.description}\n"
            text += "\n"

    if cv.skills:
        text += f"\nSKILLS\n{', '.join(cv.skills)}\n"

    if cv.projects:
        text += "\nPROJECTS\n"
        for project in cv.projects:
            text += f"{project.title}\n"
            text += f"{project.description}\n"
            text += f"Technologies: {', '.join(project.technologies)}\n\n"

    if cv.certifications:
        text += "\nCERTIFICATIONS\n"
        for cert in cv.certifications:
            text += f"{cert.name} - {cert.issuer}\n"
            text += f"Issued: {cert.date}\n\n"

    return text
