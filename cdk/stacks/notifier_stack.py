"""CDK stack for Cost Notifier Lambda and EventBridge schedule."""

from aws_cdk import (
    BundlingOptions,
    DockerImage,
    Duration,
    Stack,
    aws_events as events,
    aws_events_targets as targets,
    aws_iam as iam,
    aws_lambda as lambda_,
    aws_secretsmanager as secretsmanager,
)
from constructs import Construct


class NotifierStack(Stack):
    """
    Cost Notifier Lambda infrastructure.

    Creates:
    - Secrets Manager secret holding the Slack bot token and channel id
    - Cost Notifier Lambda function
    - EventBridge schedule for each configured UTC hour
    - IAM permissions for Cost Explorer and Secrets Manager
    """

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        environment: str,
        schedule_hours: list[int] | None = None,
        **kwargs,
    ) -> None:
        """
        Initialize the Notifier stack.

        Args:
            scope: CDK scope.
            construct_id: Stack ID.
            environment: Deployment environment (dev, staging, prod).
            schedule_hours: UTC hours to post the cost summary (default: [9]).
        """
        super().__init__(scope, construct_id, **kwargs)

        self.deploy_env = environment
        self.schedule_hours = schedule_hours or [9]

        # User must populate bot_token and channel_id after deployment
        self.config_secret = self._create_config_secret()

        self.notifier_function = self._create_notifier_lambda()
        self._grant_permissions()
        self._create_schedule()

    def _create_config_secret(self) -> secretsmanager.Secret:
        """Create the Secrets Manager secret for Slack credentials."""
        template = '{"bot_token":"","channel_id":""}'
        return secretsmanager.Secret(
            self,
            "ConfigSecret",
            secret_name=f"cost-notifier/{self.deploy_env}/config",
            description="Slack credentials for Cost Notifier",
            generate_secret_string=secretsmanager.SecretStringGenerator(
                secret_string_template=template,
                generate_string_key="placeholder",  # Not used, just required
            ),
        )

    def _create_notifier_lambda(self) -> lambda_.Function:
        """Create the Cost Notifier Lambda function."""
        return lambda_.Function(
            self,
            "CostNotifierFunction",
            function_name=f"cost-notifier-{self.deploy_env}",
            runtime=lambda_.Runtime.PYTHON_3_12,
            architecture=lambda_.Architecture.ARM_64,
            handler="slack_aws_cost_notifier.handlers.cost_notifier.handler",
            code=lambda_.Code.from_asset(
                ".",
                bundling=BundlingOptions(
                    image=DockerImage.from_registry(
                        "public.ecr.aws/sam/build-python3.12:latest"
                    ),
                    command=[
                        "bash",
                        "-c",
                        "pip install -r requirements-lambda.txt -t /asset-output && "
                        "cp -r src/slack_aws_cost_notifier /asset-output/ && "
                        "cp -r config /asset-output/",
                    ],
                ),
                exclude=[
                    "cdk.out",
                    ".git",
                    ".venv",
                    "*.pyc",
                    "__pycache__",
                    ".pytest_cache",
                    "tests",
                    "*.md",
                    ".env*",
                ],
            ),
            timeout=Duration.seconds(60),
            memory_size=256,
            environment={
                "CONFIG_SECRET_NAME": self.config_secret.secret_name,
                "CONFIG_ENV": self.deploy_env,
                "CONFIG_DIR": "/var/task/config",
            },
            description="Posts the AWS account's usage cost to Slack",
        )

    def _grant_permissions(self) -> None:
        """Grant necessary permissions to the Lambda function."""
        self.config_secret.grant_read(self.notifier_function)

        self.notifier_function.add_to_role_policy(
            iam.PolicyStatement(
                sid="CostExplorerAccess",
                effect=iam.Effect.ALLOW,
                actions=["ce:GetCostAndUsage"],
                resources=["*"],
            )
        )

    def _create_schedule(self) -> None:
        """Create an EventBridge rule for each scheduled hour."""
        for hour in self.schedule_hours:
            rule = events.Rule(
                self,
                f"NotifierSchedule{hour:02d}",
                rule_name=f"cost-notifier-schedule-{hour:02d}-{self.deploy_env}",
                description=f"Post AWS usage cost at {hour:02d}:00 UTC",
                schedule=events.Schedule.cron(
                    minute="0",
                    hour=str(hour),
                ),
            )
            rule.add_target(targets.LambdaFunction(self.notifier_function))

    @property
    def function_arn(self) -> str:
        """Get the Lambda function ARN."""
        return self.notifier_function.function_arn

    @property
    def config_secret_arn(self) -> str:
        """Get the config secret ARN."""
        return self.config_secret.secret_arn
