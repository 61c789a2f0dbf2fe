"""Fixed demonstration records used by the seed operations.

Each function returns fresh dictionaries of column values; the service
turns them into model instances and stamps `created_at`.
"""


def aspnetcore_topics():
    return [
        {
            "title": "Dependency Injection in ASP.NET Core",
            "category": "Core Concepts",
            "difficulty": "Medium",
            "key_concepts": "Service lifetimes (transient, scoped, singleton), IServiceCollection, constructor injection",
            "tags": ["DI", "IoC", "Services"],
        },
        {
            "title": "Middleware Pipeline",
            "category": "Core Concepts",
            "difficulty": "Medium",
            "key_concepts": "Request delegates, Use/Run/Map, ordering, short-circuiting",
            "tags": ["Pipeline", "HTTP", "Request Processing"],
        },
        {
            "title": "Entity Framework Core Basics",
            "category": "Data Access",
            "difficulty": "Medium",
            "key_concepts": "DbContext, DbSet, migrations, change tracking",
            "tags": ["EF Core", "ORM", "Database"],
        },
        {
            "title": "Routing and Controllers",
            "category": "Web API",
            "difficulty": "Easy",
            "key_concepts": "Attribute routing, route templates, model binding, ActionResult",
            "tags": ["Routing", "MVC", "REST"],
        },
        {
            "title": "Configuration and Options Pattern",
            "category": "Core Concepts",
            "difficulty": "Easy",
            "key_concepts": "appsettings.json, environment variables, IOptions<T>, configuration providers",
            "tags": ["Configuration", "Options"],
        },
    ]


def csharp_topics():
    return [
        {
            "title": "Value Types vs Reference Types",
            "category": "Fundamentals",
            "difficulty": "Easy",
            "key_concepts": "Stack vs heap allocation, struct vs class, boxing/unboxing, nullable value types",
            "dot_net_version": "1.0",
            "tags": ["Types", "Memory", "Fundamentals"],
        },
        {
            "title": "async/await Fundamentals",
            "category": "Async",
            "difficulty": "Medium",
            "key_concepts": "Task, await, synchronization context, ConfigureAwait, async all the way",
            "dot_net_version": "5.0",
            "tags": ["Async", "TPL", "Performance"],
        },
        {
            "title": "LINQ Basics",
            "category": "LINQ",
            "difficulty": "Medium",
            "key_concepts": "Deferred execution, query vs method syntax, IEnumerable vs IQueryable",
            "dot_net_version": "3.5",
            "tags": ["LINQ", "Querying", "Collections"],
        },
        {
            "title": "Delegates and Events",
            "category": "Fundamentals",
            "difficulty": "Medium",
            "key_concepts": "Func/Action, multicast delegates, event keyword, lambda expressions",
            "dot_net_version": "2.0",
            "tags": ["Delegates", "Events"],
        },
        {
            "title": "Generics",
            "category": "Fundamentals",
            "difficulty": "Medium",
            "key_concepts": "Type parameters, constraints, covariance and contravariance",
            "dot_net_version": "2.0",
            "tags": ["Generics", "Type Safety"],
        },
        {
            "title": "Records and Pattern Matching",
            "category": "Modern C#",
            "difficulty": "Medium",
            "key_concepts": "Record types, with-expressions, switch expressions, property patterns",
            "dot_net_version": "5.0",
            "tags": ["Records", "Pattern Matching"],
        },
    ]


def design_pattern_topics():
    return [
        {
            "title": "Singleton",
            "category": "Creational",
            "difficulty": "Easy",
            "key_concepts": "Single instance, lazy initialization, thread safety",
            "use_cases": "Configuration access, logging, caches",
            "tags": ["Creational", "Instance Control", "GoF"],
        },
        {
            "title": "Factory Method",
            "category": "Creational",
            "difficulty": "Medium",
            "key_concepts": "Defer instantiation to subclasses, program to interfaces",
            "use_cases": "Document creators, parsers chosen by input type",
            "tags": ["Creational", "Polymorphism", "GoF"],
        },
        {
            "title": "Repository Pattern",
            "category": "Architectural",
            "difficulty": "Medium",
            "key_concepts": "Collection-like data access abstraction, unit of work",
            "use_cases": "Isolating persistence from domain logic, testing with fakes",
            "tags": ["Data Access", "Abstraction", "Architecture"],
        },
        {
            "title": "Strategy",
            "category": "Behavioral",
            "difficulty": "Easy",
            "key_concepts": "Interchangeable algorithms behind a common interface",
            "use_cases": "Pricing rules, sort orders, payment providers",
            "tags": ["Behavioral", "GoF"],
        },
        {
            "title": "Decorator",
            "category": "Structural",
            "difficulty": "Medium",
            "key_concepts": "Wrap an object to add behavior without subclassing",
            "use_cases": "Caching and logging wrappers around services",
            "tags": ["Structural", "Composition", "GoF"],
        },
    ]


def entity_framework_topics():
    return [
        {
            "title": "DbContext Lifetime",
            "category": "Fundamentals",
            "difficulty": "Easy",
            "key_concepts": "Scoped contexts, unit of work, disposal",
            "ef_version": "EF Core 8",
            "tags": ["DbContext", "Lifetime"],
        },
        {
            "title": "Change Tracking",
            "category": "Fundamentals",
            "difficulty": "Medium",
            "key_concepts": "Entity states, AsNoTracking, detecting changes on SaveChanges",
            "ef_version": "EF Core 8",
            "tags": ["Change Tracking", "Performance"],
        },
        {
            "title": "N+1 Query Problem",
            "category": "Performance",
            "difficulty": "Medium",
            "key_concepts": "Lazy loading pitfalls, Include/ThenInclude, split queries",
            "problem_scenario": "Listing orders with their lines issues one query per order",
            "ef_version": "EF Core 8",
            "tags": ["Performance", "Loading"],
        },
        {
            "title": "Optimistic Concurrency",
            "category": "Concurrency",
            "difficulty": "Hard",
            "key_concepts": "Row versions, concurrency tokens, DbUpdateConcurrencyException",
            "problem_scenario": "Two users edit the same record and the last save silently wins",
            "ef_version": "EF Core 8",
            "tags": ["Concurrency", "Transactions"],
        },
        {
            "title": "Migrations",
            "category": "Schema",
            "difficulty": "Easy",
            "key_concepts": "Add-Migration, Update-Database, migration bundles, seeding",
            "ef_version": "EF Core 8",
            "tags": ["Migrations", "Schema"],
        },
    ]


def oop_topics():
    return [
        {
            "title": "Single Responsibility Principle (SRP)",
            "category": "SOLID Principles",
            "difficulty": "Easy",
            "key_concepts": "One reason to change, cohesion",
            "tags": ["SOLID", "Design", "Clean Code"],
        },
        {
            "title": "Open/Closed Principle (OCP)",
            "category": "SOLID Principles",
            "difficulty": "Medium",
            "key_concepts": "Open for extension, closed for modification",
            "tags": ["SOLID", "Extensibility", "Abstraction"],
        },
        {
            "title": "Liskov Substitution Principle (LSP)",
            "category": "SOLID Principles",
            "difficulty": "Medium",
            "key_concepts": "Subtypes must honor the base type's contract",
            "tags": ["SOLID", "Inheritance", "Polymorphism"],
        },
        {
            "title": "Interface Segregation Principle (ISP)",
            "category": "SOLID Principles",
            "difficulty": "Medium",
            "key_concepts": "Many small client-specific interfaces",
            "tags": ["SOLID", "Interfaces", "Decoupling"],
        },
        {
            "title": "Dependency Inversion Principle (DIP)",
            "category": "SOLID Principles",
            "difficulty": "Medium",
            "key_concepts": "Depend on abstractions, not concretions",
            "tags": ["SOLID", "DI", "IoC", "Abstraction"],
        },
        {
            "title": "Encapsulation",
            "category": "Four Pillars",
            "difficulty": "Easy",
            "key_concepts": "Access modifiers, hiding state behind behavior",
            "tags": ["OOP", "Fundamentals", "Access Modifiers"],
        },
        {
            "title": "Abstraction",
            "category": "Four Pillars",
            "difficulty": "Easy",
            "key_concepts": "Abstract classes, interfaces, exposing only what matters",
            "tags": ["OOP", "Fundamentals", "Design"],
        },
        {
            "title": "Inheritance",
            "category": "Four Pillars",
            "difficulty": "Easy",
            "key_concepts": "Base and derived classes, virtual/override, composition over inheritance",
            "tags": ["OOP", "Fundamentals", "Reusability"],
        },
        {
            "title": "Polymorphism",
            "category": "Four Pillars",
            "difficulty": "Medium",
            "key_concepts": "Overloading vs overriding, dynamic dispatch",
            "tags": ["OOP", "Fundamentals", "Runtime"],
        },
    ]


def azure_topics():
    return [
        {
            "title": "Azure App Service",
            "category": "Compute",
            "difficulty": "Easy",
            "key_concepts": "App Service plans, deployment slots, scaling",
            "azure_service": "App Service",
            "tags": ["PaaS", "Web Apps", "Hosting"],
        },
        {
            "title": "Azure Blob Storage",
            "category": "Storage",
            "difficulty": "Easy",
            "key_concepts": "Containers, access tiers, SAS tokens",
            "azure_service": "Storage Account",
            "tags": ["Storage", "Blobs", "Files"],
        },
        {
            "title": "Azure Functions",
            "category": "Compute",
            "difficulty": "Medium",
            "key_concepts": "Triggers and bindings, consumption plan, durable functions",
            "azure_service": "Functions",
            "tags": ["Serverless", "FaaS", "Event-Driven"],
        },
        {
            "title": "Azure Service Bus",
            "category": "Messaging",
            "difficulty": "Medium",
            "key_concepts": "Queues vs topics, sessions, dead-letter queues",
            "azure_service": "Service Bus",
            "tags": ["Messaging", "Queues"],
        },
    ]


def system_design_topics():
    return [
        {
            "title": "CAP Theorem",
            "category": "Fundamentals",
            "difficulty": "Medium",
            "key_concepts": "Consistency, availability, partition tolerance trade-offs",
            "tags": ["Distributed Systems", "Theory"],
        },
        {
            "title": "ACID Properties",
            "category": "Fundamentals",
            "difficulty": "Easy",
            "key_concepts": "Atomicity, consistency, isolation, durability",
            "tags": ["Databases", "Transactions"],
        },
        {
            "title": "Consistent Hashing",
            "category": "Fundamentals",
            "difficulty": "Medium",
            "key_concepts": "Hash ring, virtual nodes, minimal remapping",
            "tags": ["Partitioning", "Distributed Systems"],
        },
        {
            "title": "Load Balancer Basics",
            "category": "Load Balancing",
            "difficulty": "Easy",
            "key_concepts": "Round robin, least connections, health checks",
            "tags": ["Load Balancing", "Availability"],
        },
        {
            "title": "L4 vs L7 Load Balancing",
            "category": "Load Balancing",
            "difficulty": "Medium",
            "key_concepts": "Transport vs application layer routing, TLS termination",
            "tags": ["Load Balancing", "Networking"],
        },
        {
            "title": "Cache Strategies",
            "category": "Caching",
            "difficulty": "Medium",
            "key_concepts": "Cache-aside, write-through, write-behind",
            "tags": ["Caching", "Performance"],
        },
        {
            "title": "Cache Eviction Policies",
            "category": "Caching",
            "difficulty": "Easy",
            "key_concepts": "LRU, LFU, FIFO, TTL",
            "tags": ["Caching"],
        },
        {
            "title": "SQL vs NoSQL",
            "category": "Database",
            "difficulty": "Easy",
            "key_concepts": "Schemas, scaling models, consistency guarantees",
            "tags": ["Databases"],
        },
        {
            "title": "Database Sharding",
            "category": "Database",
            "difficulty": "Hard",
            "key_concepts": "Shard keys, range vs hash sharding, resharding",
            "tags": ["Databases", "Scalability", "Partitioning"],
        },
        {
            "title": "Database Replication",
            "category": "Database",
            "difficulty": "Medium",
            "key_concepts": "Leader-follower, multi-leader, replication lag",
            "tags": ["Databases", "Availability"],
        },
        {
            "title": "Message Queue Basics",
            "category": "Message Queues",
            "difficulty": "Medium",
            "key_concepts": "Producers and consumers, at-least-once delivery, back-pressure",
            "tags": ["Messaging", "Async"],
        },
        {
            "title": "API Gateway",
            "category": "Microservices",
            "difficulty": "Medium",
            "key_concepts": "Routing, authentication offload, rate limiting, aggregation",
            "tags": ["Microservices", "Edge"],
        },
    ]


def _leetcode(number, title, slug, category, difficulty, tags):
    return {
        "title": title,
        "category": category,
        "difficulty": difficulty,
        "platform": "LeetCode",
        "leetcode_number": number,
        "problem_url": f"https://leetcode.com/problems/{slug}/",
        "tags": tags,
    }


def dsa_problems():
    return [
        _leetcode(1, "Two Sum", "two-sum", "Array", "Easy", ["Hash Table", "Array"]),
        _leetcode(121, "Best Time to Buy and Sell Stock", "best-time-to-buy-and-sell-stock", "Array", "Easy",
                  ["Array", "DP"]),
        _leetcode(238, "Product of Array Except Self", "product-of-array-except-self", "Array", "Medium",
                  ["Array", "Prefix Sum"]),
        _leetcode(53, "Maximum Subarray", "maximum-subarray", "Array", "Medium", ["Array", "DP", "Kadane"]),
        _leetcode(15, "3Sum", "3sum", "Array", "Medium", ["Array", "Two Pointers"]),
        _leetcode(242, "Valid Anagram", "valid-anagram", "String", "Easy", ["String", "Hash Table"]),
        _leetcode(3, "Longest Substring Without Repeating Characters",
                  "longest-substring-without-repeating-characters", "String", "Medium",
                  ["String", "Sliding Window"]),
        _leetcode(76, "Minimum Window Substring", "minimum-window-substring", "String", "Hard",
                  ["String", "Sliding Window"]),
        _leetcode(206, "Reverse Linked List", "reverse-linked-list", "Linked List", "Easy", ["Linked List"]),
        _leetcode(23, "Merge K Sorted Lists", "merge-k-sorted-lists", "Linked List", "Hard", ["Linked List", "Heap"]),
        _leetcode(226, "Invert Binary Tree", "invert-binary-tree", "Tree", "Easy", ["Tree", "BFS", "DFS"]),
        _leetcode(98, "Validate Binary Search Tree", "validate-binary-search-tree", "Tree", "Medium", ["Tree", "BST"]),
        _leetcode(70, "Climbing Stairs", "climbing-stairs", "Dynamic Programming", "Easy", ["DP"]),
        _leetcode(322, "Coin Change", "coin-change", "Dynamic Programming", "Medium", ["DP"]),
        _leetcode(200, "Number of Islands", "number-of-islands", "Graph", "Medium", ["Graph", "DFS", "BFS"]),
    ]
