from typing import Annotated

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from core.models import DatabaseType


def register_prompts(mcp: FastMCP) -> None:
    @mcp.prompt(
        name="deploy-app",
        title="Deploy Application Workflow",
        description="Interactive prompt to guide through application deployment",
    )
    def deploy_app_prompt(
        projectName: Annotated[str, Field(description="Name for the new project")],
        appName: Annotated[str, Field(description="Name for the application")],
        repository: Annotated[str, Field(description="Git repository URL")],
    ) -> str:
        return f"""I want to deploy a new application on Dokploy. Here are the details:
- Project Name: {projectName}
- Application Name: {appName}
- Repository: {repository}

Please help me:
1. Create a new project (create-project)
2. Create an application in that project (create-application)
3. Deploy the application (deploy-application)
4. Check the deployment status (get-application-status)

Guide me through each step."""

    @mcp.prompt(
        name="setup-database",
        title="Database Setup Workflow",
        description="Interactive prompt to guide through database creation and configuration",
    )
    def setup_database_prompt(
        projectId: Annotated[str, Field(description="Project ID to create the database in")],
        dbType: Annotated[DatabaseType, Field(description="Database type")],
        dbName: Annotated[str, Field(description="Database name")],
    ) -> str:
        return f"""I want to set up a {dbType} database named "{dbName}" in project {projectId}.

Please help me:
1. Create the database (create-database)
2. Show me the connection details
3. Set up automatic backups (create-backup)

Guide me through the process."""

    @mcp.prompt(
        name="troubleshoot",
        title="Troubleshoot Application",
        description="Interactive prompt to help troubleshoot application issues",
    )
    def troubleshoot_prompt(
        applicationId: Annotated[str, Field(description="Application ID to troubleshoot")],
    ) -> str:
        return f"""My application (ID: {applicationId}) is having issues. Please help me troubleshoot by:
1. Checking the application status (get-application-status)
2. Reviewing recent logs (get-logs)
3. Suggesting potential fixes

Start the diagnostic process."""
