"""Schemas for job listings and bookmarks."""

from pydantic import BaseModel, ConfigDict, Field

from jobboard.models.bookmark import JobBookmark
from jobboard.models.job import Job


class JobLookupRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    public_id: str = Field(default="", alias="publicid")


class JobsByRadiusRequest(BaseModel):
    zipcode: str = Field(default="")
    radius: float = Field(default=0.0, ge=0, description="Radius in miles")


class BookmarkRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    job_id: str = Field(default="", alias="jobid")


class JobResponse(BaseModel):
    """Job listing joined with its employer's company."""

    model_config = ConfigDict(populate_by_name=True)

    public_id: str = Field(..., alias="publicid")
    title: str
    job_type: str = Field(default="", alias="jobtype")
    category: str = ""
    description: str = ""
    visible_date: str = Field(default="", alias="visibledate")
    remote: bool = False
    min_salary: int = Field(default=0, alias="minsalary")
    max_salary: int = Field(default=0, alias="maxsalary")
    pay_period: str = Field(default="", alias="payperiod")
    is_customized: bool = Field(default=False, alias="iscustomized")
    company_public_id: str = Field(default="", alias="companypublicid")
    company_name: str = Field(default="", alias="companyname")
    company_url: str = Field(default="", alias="companyurl")
    company_logo: str = Field(default="", alias="companylogo")
    company_location: str = Field(default="", alias="companylocation")

    @classmethod
    def from_model(cls, job: Job) -> "JobResponse":
        """Build the response from a job with employer and company loaded."""
        company = job.employer.company
        return cls(
            public_id=job.public_id,
            title=job.title,
            job_type=job.job_type or "",
            category=job.category or "",
            description=job.description or "",
            visible_date=job.visible_date.isoformat() if job.visible_date else "",
            remote=job.remote,
            min_salary=job.min_salary or 0,
            max_salary=job.max_salary or 0,
            pay_period=job.pay_period or "",
            is_customized=job.is_customized,
            company_public_id=company.public_id,
            company_name=company.name,
            company_url=company.url or "",
            company_logo=company.logo or "",
            company_location=company.location or "",
        )


class BookmarkResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    public_id: str = Field(..., alias="publicid")
    applicant_public_id: str = Field(..., alias="applicantpublicid")
    job_public_id: str = Field(..., alias="jobpublicid")

    @classmethod
    def from_model(cls, bookmark: JobBookmark) -> "BookmarkResponse":
        return cls(
            public_id=bookmark.public_id,
            applicant_public_id=bookmark.applicant_public_id,
            job_public_id=bookmark.job_public_id,
        )
