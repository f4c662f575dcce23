"""
Demonstration of a world-wide CloudFormation template audit.

Finds every stack, in every catalog region, whose processed template
declares an S3 bucket without server-side encryption settings.
Requires AWS credentials in the default boto3 chain.
"""

import asyncio

from stack_auditor import AuditConditions, StackAPIError, TemplateStage, configure_logging
from stack_auditor import get_templates, get_world_wide_templates
from stack_auditor.config import settings


async def unencrypted_bucket(template_body: str) -> bool:
    """Async predicate: the template has a bucket and no encryption block."""
    return "AWS::S3::Bucket" in template_body and "BucketEncryption" not in template_body


async def main():
    configure_logging(settings().log_level)

    print("=" * 60)
    print(f"Stacks in {settings().aws_region}")
    print("=" * 60)
    records = await get_templates(settings().aws_region)
    for record in records:
        print(f"  {record.summary.stack_name:40} {record.summary.stack_status}")

    print("\n" + "=" * 60)
    print("Unencrypted buckets, all regions")
    print("=" * 60)
    conditions = AuditConditions(
        statuses=["CREATE_COMPLETE", "UPDATE_COMPLETE", "UPDATE_ROLLBACK_COMPLETE"],
        template_filter=unencrypted_bucket,
        stage=TemplateStage.PROCESSED,
    )
    try:
        records = await get_world_wide_templates(conditions)
    except StackAPIError as e:
        print(f"Audit failed: {e} (code={e.error_code})")
        return

    for record in records:
        print(f"  {record.region:16} {record.summary.stack_name}")
    print(f"\n{len(records)} stacks flagged")


if __name__ == "__main__":
    asyncio.run(main())
