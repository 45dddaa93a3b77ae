MESSAGES = {
    "common": {
        "add": "Add",
        "delete": "Delete",
        "save": "Save",
        "action": "Action",
        "refresh": "Refresh",
        "createdAt": "Created At",
        "updatedAt": "Updated At",
        "confirmDelete": "Sure to delete?",
        "success": "Success",
        "error": "Error",
        "required": "Required",
        "id": "ID",
        "description": "Description",
        "logout": "Logout",
        "language": "Language",
        "previous": "Previous",
        "next": "Next",
    },
    "login": {
        "title": "Mail Generator Login",
        "password": "Password",
        "loginButton": "Login",
        "passwordPlaceholder": "Please input your password!",
    },
    "menu": {
        "domains": "Domains",
        "accounts": "Accounts",
        "logs": "Logs",
    },
    "domain": {
        "addTitle": "Add Domain",
        "name": "Domain Name",
        "namePlaceholder": "example.com",
        "instruction": "Instructions: Add an MX record for this domain pointing to this server.",
        "added": "Domain added",
        "deleted": "Domain deleted",
    },
    "account": {
        "addTitle": "Add Account Rule",
        "pattern": "Pattern (Regex)",
        "patternPlaceholder": "^.*@example\\.com$",
        "patternTip": "Use Regex. E.g. ^support@.*$ or ^.*@mydomain\\.com$",
        "forwardTo": "Forward To",
        "forwardToPlaceholder": "me@gmail.com",
        "hitCount": "Hit Count",
        "added": "Account rule added",
        "updated": "Account rule updated",
        "deleted": "Account deleted",
    },
    "log": {
        "from": "From",
        "to": "To",
        "subject": "Subject",
        "status": "Status",
        "time": "Time",
        "total": "Total",
    },
}
