"""
Microsoft AI ecosystem catalog: products, licensing, product relationships,
Frontier Firm program and MCP support.
"""

from typing import Any, Dict, List

PRODUCT_CATEGORIES = ['Agent Platform', 'Low-Code', 'Enterprise AI', 'Data Platform', 'Developer']

MICROSOFT_PRODUCTS: List[Dict[str, Any]] = [
    {
        'id': 'copilot-studio',
        'name': 'Microsoft Copilot Studio',
        'category': 'Agent Platform',
        'description': 'Low-code platform for building custom AI agents and extending Microsoft 365 Copilot with conversational experiences and automated workflows.',
        'key_features': [
            'Visual agent builder with drag-and-drop interface',
            'Topic-based conversation design',
            'Plugin and connector framework',
            'Multi-channel deployment (Teams, web, mobile)',
        ],
        'ai_capabilities': [
            'Knowledge grounding from SharePoint/Dataverse',
            'Generative answers from documents',
            'Multi-turn conversation handling',
        ],
        'pricing': {
            'model': 'Capacity-based messages',
            'tiers': [
                {'name': 'Standard', 'price': '$200/tenant/month', 'includes': ['25,000 messages', 'Unlimited agents', 'Standard connectors']},
                {'name': 'Enterprise', 'price': 'Custom', 'includes': ['Unlimited messages', 'Premium connectors', 'Dedicated support']},
            ],
        },
        'integrations': ['Microsoft 365', 'Dynamics 365', 'Power Platform', 'Azure', 'SharePoint', 'Teams'],
        'target_users': ['Citizen developers', 'IT admins', 'Business analysts', 'Customer service managers'],
        'mcp_support': True,
        'agent_types': ['Customer service', 'HR assistant', 'IT helpdesk', 'Sales enablement'],
        'connector_count': 1400,
        'compliance': ['SOC2', 'HIPAA', 'GDPR', 'FedRAMP'],
        'release_wave': '2025 Wave 1',
        'strengths': ['Deep Microsoft 365 integration', 'No-code agent creation', 'Enterprise security built-in', 'Rapid deployment to Teams'],
        'limitations': ['Requires Power Platform licensing', 'Limited customization for complex scenarios', 'Message-based pricing can scale quickly'],
        'recommendation': 'Ideal for organizations already invested in Microsoft 365 looking to automate customer service or internal IT support. Start with HR FAQ or IT helpdesk use cases.',
    },
    {
        'id': 'power-automate',
        'name': 'Power Automate',
        'category': 'Low-Code',
        'description': 'Cloud-based workflow automation platform with AI Builder integration for intelligent document processing and decision automation.',
        'key_features': ['Cloud and desktop flows', 'Process mining', 'Approval workflows', 'Copilot flow authoring'],
        'ai_capabilities': ['Document processing with AI Builder', 'Natural language flow creation'],
        'pricing': {
            'model': 'Per user or per flow',
            'tiers': [
                {'name': 'Premium', 'price': '$15/user/month', 'includes': ['Unlimited cloud flows', 'Premium connectors', 'AI Builder credits']},
                {'name': 'Per Flow', 'price': '$100/flow/month', 'includes': ['5 users per flow', 'Premium connectors', 'Unlimited runs']},
                {'name': 'Process', 'price': '$150/user/month', 'includes': ['All Premium features', 'Process mining', 'Attended RPA']},
            ],
        },
        'integrations': ['Office 365', 'Dynamics 365', 'SharePoint', 'Azure', 'SAP', 'Salesforce', 'ServiceNow'],
        'target_users': ['Business analysts', 'IT professionals', 'Process owners', 'Operations teams'],
        'mcp_support': False,
        'agent_types': [],
        'connector_count': 1000,
        'compliance': ['SOC2', 'HIPAA', 'GDPR', 'FedRAMP', 'ISO 27001'],
        'release_wave': '2025 Wave 1',
        'strengths': ['Large connector library', 'Desktop RPA included in Process tier'],
        'limitations': ['Complex flows are hard to debug', 'Premium connectors need premium licensing'],
        'recommendation': 'Best for automating approval workflows, document processing, and connecting Microsoft ecosystem to external tools. Combine with AI Builder for intelligent document automation.',
    },
    {
        'id': 'power-apps',
        'name': 'Power Apps',
        'category': 'Low-Code',
        'description': 'Low-code application development platform for building custom business apps with AI-powered features and Copilot assistance.',
        'key_features': ['Canvas and model-driven apps', 'Copilot app generation', 'Offline mobile support'],
        'ai_capabilities': ['Copilot-generated app structure', 'Embedded AI Builder components'],
        'pricing': {
            'model': 'Per user or per app',
            'tiers': [
                {'name': 'Premium', 'price': '$20/user/month', 'includes': ['Unlimited apps', 'Dataverse access', 'Premium connectors']},
                {'name': 'Per App', 'price': '$5/user/app/month', 'includes': ['Single app access', 'Dataverse access', 'Standard connectors']},
            ],
        },
        'integrations': ['Dataverse', 'SharePoint', 'SQL Server', 'Azure', 'Dynamics 365'],
        'target_users': ['Citizen developers', 'Business analysts', 'IT professionals', 'Department heads'],
        'mcp_support': False,
        'agent_types': [],
        'connector_count': 900,
        'compliance': ['SOC2', 'HIPAA', 'GDPR', 'FedRAMP'],
        'release_wave': '2025 Wave 1',
        'strengths': ['Fast departmental app delivery', 'Native Dataverse security model'],
        'limitations': ['UI customization limits', 'Licensing complexity across app types'],
        'recommendation': 'Excellent for departmental apps, data collection, and extending Dynamics 365. Use Copilot to generate initial app structure, then customize.',
    },
    {
        'id': 'power-pages',
        'name': 'Power Pages',
        'category': 'Low-Code',
        'description': 'Low-code platform for building secure, data-driven external-facing websites with Copilot-assisted design.',
        'key_features': ['Design studio templates', 'Authenticated portals', 'Copilot page design'],
        'ai_capabilities': ['Copilot-assisted layout and forms'],
        'pricing': {
            'model': 'Capacity-based',
            'tiers': [
                {'name': 'Authenticated', 'price': '$200/site/month', 'includes': ['100 authenticated users', 'Custom domain', 'SSL']},
                {'name': 'Anonymous', 'price': '$75/site/month', 'includes': ['500,000 anonymous users', 'Custom domain', 'SSL']},
            ],
        },
        'integrations': ['Dataverse', 'Power Platform', 'Azure AD', 'SharePoint'],
        'target_users': ['Web developers', 'Marketing teams', 'IT professionals'],
        'mcp_support': False,
        'agent_types': [],
        'connector_count': None,
        'compliance': ['SOC2', 'GDPR'],
        'release_wave': None,
        'strengths': ['Secure external access to Dataverse data'],
        'limitations': ['Not suited to complex marketing sites'],
        'recommendation': 'Good for customer portals, partner extranets, and event registration sites. Not recommended for complex marketing sites.',
    },
    {
        'id': 'power-bi',
        'name': 'Power BI',
        'category': 'Low-Code',
        'description': 'Business intelligence platform with AI-powered insights, natural language Q&A, and Copilot for report generation.',
        'key_features': ['Interactive dashboards', 'Natural language Q&A', 'Copilot report generation'],
        'ai_capabilities': ['Anomaly detection', 'Key influencer visuals', 'Smart narratives'],
        'pricing': {
            'model': 'Per user',
            'tiers': [
                {'name': 'Pro', 'price': '$10/user/month', 'includes': ['Full authoring', 'Sharing', 'Standard capacity']},
                {'name': 'Premium Per User', 'price': '$20/user/month', 'includes': ['AI features', 'Larger datasets', 'Paginated reports']},
                {'name': 'Premium Capacity', 'price': '$4,995/month', 'includes': ['Dedicated capacity', 'Unlimited viewers', 'Advanced AI']},
            ],
        },
        'integrations': ['Excel', 'Azure', 'Dynamics 365', 'SharePoint', 'SQL Server', 'Dataverse'],
        'target_users': ['Business analysts', 'Data analysts', 'Executives', 'IT professionals'],
        'mcp_support': False,
        'agent_types': [],
        'connector_count': None,
        'compliance': ['SOC2', 'HIPAA', 'GDPR', 'FedRAMP', 'ISO 27001'],
        'release_wave': None,
        'strengths': ['Market-leading BI', 'Copilot lowers the skills barrier'],
        'limitations': ['Advanced AI needs Premium'],
        'recommendation': 'Essential for any Microsoft shop. Copilot makes it accessible to business users who previously needed analyst support.',
    },
    {
        'id': 'dataverse',
        'name': 'Microsoft Dataverse',
        'category': 'Data Platform',
        'description': 'Secure, scalable data platform underlying Power Platform and Dynamics 365, with AI-ready data infrastructure.',
        'key_features': ['Relational and file storage', 'Role-based security', 'Business rules'],
        'ai_capabilities': ['Knowledge grounding for agents', 'Search with semantic indexing'],
        'pricing': {
            'model': 'Capacity-based',
            'tiers': [
                {'name': 'Included', 'price': 'Included with Power Apps/Dynamics', 'includes': ['Per-app capacity', 'Standard features']},
                {'name': 'Additional Capacity', 'price': '$40/GB/month', 'includes': ['Additional database storage', 'File storage']},
            ],
        },
        'integrations': ['Power Platform', 'Dynamics 365', 'Azure Synapse', 'Azure Data Lake'],
        'target_users': ['IT admins', 'Data architects', 'Developers'],
        'mcp_support': True,
        'agent_types': [],
        'connector_count': None,
        'compliance': ['SOC2', 'HIPAA', 'GDPR', 'FedRAMP', 'ISO 27001'],
        'release_wave': None,
        'strengths': ['Single data layer for Power Platform'],
        'limitations': ['Storage capacity is costly'],
        'recommendation': 'The backbone of Microsoft business apps. Essential for Copilot Studio agents and Power Platform apps. Plan capacity carefully.',
    },
    {
        'id': 'ai-builder',
        'name': 'AI Builder',
        'category': 'Enterprise AI',
        'description': 'No-code AI capability for Power Platform, enabling document processing, prediction, and custom models.',
        'key_features': ['Invoice and receipt processing', 'Prediction models', 'Custom document models'],
        'ai_capabilities': ['Form processing', 'Object detection', 'Sentiment analysis'],
        'pricing': {
            'model': 'Credit-based',
            'tiers': [
                {'name': 'Included', 'price': 'Included with Power Apps Premium', 'includes': ['Limited AI credits', 'Pre-built models']},
                {'name': 'Add-on', 'price': '$500/month', 'includes': ['1M AI credits', 'Custom models', 'Priority processing']},
            ],
        },
        'integrations': ['Power Apps', 'Power Automate', 'Dataverse'],
        'target_users': ['Citizen developers', 'Business analysts', 'Process owners'],
        'mcp_support': False,
        'agent_types': [],
        'connector_count': None,
        'compliance': ['SOC2', 'GDPR'],
        'release_wave': None,
        'strengths': ['Pre-built models work out of the box'],
        'limitations': ['Custom models need 50+ training examples'],
        'recommendation': 'Start with pre-built models for invoices and receipts. Build custom models when you have 50+ training examples.',
    },
    {
        'id': 'azure-ai-foundry',
        'name': 'Azure AI Foundry',
        'category': 'Developer',
        'description': 'Unified platform for building, customizing, and deploying enterprise AI solutions with Azure OpenAI Service.',
        'key_features': ['Model catalog', 'Prompt flow', 'Evaluation tooling', 'Fine-tuning'],
        'ai_capabilities': ['Azure OpenAI models', 'RAG pipelines', 'Content safety filters'],
        'pricing': {
            'model': 'Pay-as-you-go tokens',
            'tiers': [
                {'name': 'Standard', 'price': 'Per 1K tokens', 'includes': ['API access', 'Shared capacity']},
                {'name': 'Provisioned', 'price': 'Reserved capacity', 'includes': ['Guaranteed throughput', 'Lower latency']},
            ],
        },
        'integrations': ['Azure services', 'Power Platform', 'Microsoft 365', 'GitHub'],
        'target_users': ['AI engineers', 'Developers', 'Data scientists'],
        'mcp_support': True,
        'agent_types': [],
        'connector_count': None,
        'compliance': ['SOC2', 'HIPAA', 'GDPR', 'FedRAMP', 'ISO 27001'],
        'release_wave': None,
        'strengths': ['Enterprise security and networking', 'Broad model choice'],
        'limitations': ['Requires engineering skills'],
        'recommendation': 'For custom AI applications requiring enterprise security. Use for RAG implementations and fine-tuned models. Pair with Copilot Studio for end-user access.',
    },
    {
        'id': 'agent-365',
        'name': 'Microsoft 365 Copilot (Agents)',
        'category': 'Agent Platform',
        'description': 'Enterprise AI assistant deeply integrated with Microsoft 365 apps, extensible with custom agents and plugins.',
        'key_features': ['Copilot in Word, Excel, PowerPoint, Outlook and Teams', 'Graph-grounded chat', 'Agent store'],
        'ai_capabilities': ['Meeting intelligence', 'Email drafting', 'Document summarization'],
        'pricing': {
            'model': 'Per user',
            'tiers': [
                {'name': 'Microsoft 365 Copilot', 'price': '$30/user/month', 'includes': ['All M365 apps', 'Graph grounding', 'Basic agents']},
            ],
        },
        'integrations': ['Outlook', 'Teams', 'Word', 'Excel', 'PowerPoint', 'SharePoint', 'OneDrive'],
        'target_users': ['Knowledge workers', 'Executives', 'Sales teams', 'All Microsoft 365 users'],
        'mcp_support': True,
        'agent_types': ['Sales agent', 'HR agent', 'IT support', 'Project manager'],
        'connector_count': None,
        'compliance': ['SOC2', 'HIPAA', 'GDPR', 'FedRAMP', 'ISO 27001'],
        'release_wave': '2025 Wave 1',
        'strengths': ['Works where users already are'],
        'limitations': ['Value depends on content hygiene in SharePoint'],
        'recommendation': 'The cornerstone of Microsoft AI strategy. Deploy to executives and high-value users first. Measure time savings to build ROI case for broader rollout.',
    },
    {
        'id': 'frontier-program',
        'name': 'Frontier Firm Program',
        'category': 'Enterprise AI',
        'description': 'Microsoft program for organizations achieving AI maturity across their operations with dedicated support and resources.',
        'key_features': ['Dedicated support', 'Early access to features', 'Advisory services'],
        'ai_capabilities': ['Early access to agent capabilities'],
        'pricing': {
            'model': 'Program-based',
            'tiers': [
                {'name': 'Frontier Firm', 'price': 'Enterprise agreement required', 'includes': ['Dedicated support', 'Early access', 'Advisory services']},
            ],
        },
        'integrations': ['All Microsoft platforms'],
        'target_users': ['C-suite', 'IT leadership', 'Digital transformation leads'],
        'mcp_support': False,
        'agent_types': [],
        'connector_count': None,
        'compliance': ['Enterprise-level'],
        'release_wave': None,
        'strengths': ['Direct Microsoft engagement'],
        'limitations': ['Enterprise agreement required'],
        'recommendation': 'For enterprise clients committed to AI-first transformation. INT Inc. can help prepare organizations for Frontier Firm qualification.',
    },
]

LICENSING_OPTIONS: List[Dict[str, Any]] = [
    {
        'id': 'power-platform-premium',
        'name': 'Power Platform Premium',
        'price': '$20',
        'billing_cycle': 'monthly',
        'per_user': True,
        'includes': ['Power Apps Premium', 'Power Automate Premium', 'Dataverse access', 'AI Builder credits'],
        'add_ons': [
            {'name': 'Additional AI Builder', 'price': '$500/month'},
            {'name': 'Power Pages', 'price': '$200/site/month'},
        ],
    },
    {
        'id': 'm365-copilot',
        'name': 'Microsoft 365 Copilot',
        'price': '$30',
        'billing_cycle': 'monthly',
        'per_user': True,
        'includes': ['Copilot in all M365 apps', 'Graph grounding', 'Meeting intelligence', 'Email assistance'],
        'add_ons': [],
    },
    {
        'id': 'copilot-studio-standalone',
        'name': 'Copilot Studio Standalone',
        'price': '$200',
        'billing_cycle': 'monthly',
        'per_user': False,
        'includes': ['25,000 messages', 'Unlimited agents', 'Standard connectors'],
        'add_ons': [{'name': 'Additional messages', 'price': '$100/25K messages'}],
    },
    {
        'id': 'power-bi-pro',
        'name': 'Power BI Pro',
        'price': '$10',
        'billing_cycle': 'monthly',
        'per_user': True,
        'includes': ['Full report authoring', 'Sharing and collaboration', 'Data refresh'],
        'add_ons': [],
    },
    {
        'id': 'power-bi-premium-per-user',
        'name': 'Power BI Premium Per User',
        'price': '$20',
        'billing_cycle': 'monthly',
        'per_user': True,
        'includes': ['All Pro features', 'AI visuals', 'Paginated reports', 'Larger datasets'],
        'add_ons': [],
    },
    {
        'id': 'azure-openai-payg',
        'name': 'Azure OpenAI Pay-As-You-Go',
        'price': 'Variable',
        'billing_cycle': 'monthly',
        'per_user': False,
        'includes': ['Token-based billing', 'Model access', 'API usage'],
        'add_ons': [],
    },
]

PRODUCT_RELATIONSHIPS: List[Dict[str, str]] = [
    {'source': 'copilot-studio', 'target': 'dataverse', 'relationship_type': 'powers', 'description': 'Dataverse provides knowledge grounding for Copilot Studio agents'},
    {'source': 'copilot-studio', 'target': 'power-automate', 'relationship_type': 'integrates', 'description': 'Agents can trigger Power Automate flows for actions'},
    {'source': 'power-automate', 'target': 'ai-builder', 'relationship_type': 'extends', 'description': 'AI Builder adds intelligence to automation flows'},
    {'source': 'power-apps', 'target': 'dataverse', 'relationship_type': 'powers', 'description': 'Dataverse is the primary data source for Power Apps'},
    {'source': 'power-apps', 'target': 'ai-builder', 'relationship_type': 'extends', 'description': 'AI Builder components embedded in Power Apps'},
    {'source': 'power-bi', 'target': 'dataverse', 'relationship_type': 'integrates', 'description': 'Power BI connects to Dataverse for reporting'},
    {'source': 'agent-365', 'target': 'copilot-studio', 'relationship_type': 'extends', 'description': 'Copilot Studio creates custom agents for M365 Copilot'},
    {'source': 'agent-365', 'target': 'azure-ai-foundry', 'relationship_type': 'powers', 'description': 'Azure AI Foundry models power M365 Copilot responses'},
    {'source': 'azure-ai-foundry', 'target': 'copilot-studio', 'relationship_type': 'powers', 'description': 'Custom models from Foundry can be used in Copilot Studio'},
    {'source': 'power-pages', 'target': 'dataverse', 'relationship_type': 'powers', 'description': 'Power Pages displays Dataverse data externally'},
]

FRONTIER_FIRM_STATS: Dict[str, Any] = {
    'productivity_gain': '22%',
    'adoption_rate': '78%',
    'roi_timeline': '6-12 months',
    'key_pillars': [
        {'name': 'Leadership Commitment', 'description': 'Executive sponsorship and AI-first strategy'},
        {'name': 'Change Management', 'description': 'Structured adoption and training programs'},
        {'name': 'Technical Foundation', 'description': 'Modern data infrastructure and security'},
        {'name': 'Use Case Portfolio', 'description': 'Identified and prioritized AI opportunities'},
        {'name': 'Governance Framework', 'description': 'Responsible AI policies and monitoring'},
    ],
    'readiness_checklist': [
        'Microsoft 365 E3/E5 deployment',
        'SharePoint content organized and tagged',
        'Power Platform governance established',
        'Data classification in place',
        'Executive AI champion identified',
        'Pilot user group selected',
        'Success metrics defined',
        'Change management plan created',
    ],
}

MCP_CAPABILITIES: Dict[str, Any] = {
    'description': 'Model Context Protocol (MCP) enables AI assistants to connect with external data sources and tools securely.',
    'supported_products': ['copilot-studio', 'agent-365', 'azure-ai-foundry', 'dataverse'],
    'servers': [
        {'name': 'SharePoint MCP Server', 'capability': 'Document access and search'},
        {'name': 'Dataverse MCP Server', 'capability': 'Business data queries'},
        {'name': 'Graph MCP Server', 'capability': 'User and organizational context'},
        {'name': 'Azure Blob MCP Server', 'capability': 'File storage access'},
    ],
    'benefits': [
        'Secure data access without data movement',
        'Real-time information retrieval',
        'Consistent context across AI tools',
        'Reduced hallucination through grounding',
    ],
}
